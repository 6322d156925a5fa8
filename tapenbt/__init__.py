"""Read and write the NBT binary tag format, with MUTF-8 strings and inventory helpers."""

__version__ = "0.6.1"