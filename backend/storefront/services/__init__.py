"""Service layer.

Application services live in subpackages and are imported from there
(``storefront.services.customers``, ``storefront.services.products``).
Shared primitives (``BaseService``, ``ServiceContext``, the error taxonomy
and the ports) live in ``storefront.services._shared``.
"""
