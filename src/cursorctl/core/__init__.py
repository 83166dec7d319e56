"""Shared runtime helpers: context, env, errors, logging, processes, serialization."""
