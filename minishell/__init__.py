"""A small interactive command shell with env, setenv, unsetenv and cd built-ins."""

__version__ = "0.1.0"