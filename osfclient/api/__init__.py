"""osfclient adapter package.

Architectural role:
- Defines the terminal interaction boundary.
- Delegates signing, transport and decoding to `osfclient.core`.
"""
