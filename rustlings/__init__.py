"""Support code for Rust exercises: rust-analyzer project files, status lines and worked lessons."""

__version__ = "5.5.1"