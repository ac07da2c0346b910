"""Colloid language toolchain."""
