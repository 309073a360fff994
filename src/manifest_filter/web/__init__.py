"""HTTP layer — FastAPI routes over :class:`~manifest_filter.core.manifest_service.ManifestService`.

Rules
-----
* No transform logic; options are decoded and handed to the core.
* Every :class:`~manifest_filter.exceptions.ManifestFilterError` maps to a ``400``.
"""
