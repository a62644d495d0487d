"""Interfaces (application boundary) for ROSTER.

Defines framework-free contracts shared by the service layer and adapters.
Business rules stay out of this package.

Dependency rule: may import `roster.domain` only. It may be imported by
`roster.service_layer`, `roster.adapters`, and `roster.bootstrap`.
"""
