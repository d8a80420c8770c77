"""Test suite for chdkpkg."""
