"""Identity bounded context: roles."""
