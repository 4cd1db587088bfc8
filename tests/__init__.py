"""Test suite for the movie review feature generator."""
