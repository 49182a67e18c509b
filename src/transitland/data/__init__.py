"""HTTP access to the Transitland REST API."""
