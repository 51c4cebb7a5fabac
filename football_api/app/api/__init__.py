"""
HTTP layer.

``router`` in ``api.router`` collects the domain routers defined in
``api/endpoints``; handlers validate request shape, call a service
and translate its outcome into a status code.
"""
