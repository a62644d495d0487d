"""Entrypoints (inbound adapters) for ROSTER.

Expose the application to the outside world. Parse and validate inputs, get
services from `roster.bootstrap`, and present results.

Dependency rule: may import `roster.bootstrap`, `roster.service_layer` and
`roster.interfaces`; avoid importing `roster.adapters` directly.
"""
