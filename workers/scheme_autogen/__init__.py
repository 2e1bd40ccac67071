"""
scheme_autogen — Synthesize per-target IDE scheme descriptors
(build / test / launch / profile / analyze / archive) from build targets.

The core is pure: it never touches the filesystem.  Loading targets and
writing descriptors live in ``scheme_autogen.io``.
"""

__version__ = "1.0.0"
GENERATOR_VERSION = "v1"
PACKAGE_NAME = "scheme_autogen"
SCHEMA_VERSION = "0.1"
