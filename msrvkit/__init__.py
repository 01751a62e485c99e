"""Search for and record the minimum supported toolchain version of a Cargo crate."""

__version__ = "0.1.0"