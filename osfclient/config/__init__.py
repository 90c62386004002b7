"""Configuration package.

Resolves endpoint credentials and user identity from the process environment
(optionally seeded from a `.env` file) and exposes them as an immutable
`osfclient.core.context.OsfContext`.
"""
