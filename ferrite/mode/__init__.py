"""Modes of operation: validating the environment and exporting it as a .env file."""