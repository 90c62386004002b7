"""Shared request pipeline.

Every endpoint call funnels through this package:
    - `canonical`: parameter normalization and the signature payload string.
    - `signing`: two-stage MD5 digest + HMAC-SHA1 request authentication.
    - `transport`: single synchronous GET/POST dispatch.
    - `decoding`: mime-keyed response decoding strategies.
    - `records`: escape repair and canonical record reshaping.
    - `query`: the pipeline tying the stages together.
"""
