"""Test implementations of the util-buffer interfaces."""
