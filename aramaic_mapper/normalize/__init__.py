"""Dotting removal and word ordering."""
