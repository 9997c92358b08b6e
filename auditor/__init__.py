"""Auditor: catalog-driven audit event validation and emission.

Events are validated against a catalog schema and the ambient request
context, assembled into immutable structured messages and handed to a sink.
"""
