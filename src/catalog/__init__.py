"""Product catalog HTTP service.

Layers, top-down: FastAPI routers in ``api``, business services in
``core.services``, and entity packages (transfer object, table, repository)
in ``entities``.
"""

__version__ = "0.1.0"
