"""
API package containing the HTTP routes.

``router`` exposes one aggregated router per service; the individual
routes live in ``endpoints``.
"""
