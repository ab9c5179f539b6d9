"""Specifications, schemas, registries and resolved values of environment variables."""