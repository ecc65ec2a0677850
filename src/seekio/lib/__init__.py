"""
# seekio Core Library

This package contains the core building blocks of seekio: numeric argument
parsing, the command model, the file session, the interpreter and the bulk
copy helper, together with the logging, configuration and error types the
CLI depends on.
"""
