"""
API package containing the HTTP routes.

``router`` in ``router.py`` bundles every endpoint module found in
``endpoints`` and is included by ``main.create_app``.
"""
