"""Test suite for the build server service."""
