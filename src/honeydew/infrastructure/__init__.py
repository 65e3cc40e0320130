"""Adapters for Consul, git and the local working tree."""
