"""Endpoint definitions for the Redmine REST resources, one module per resource."""
