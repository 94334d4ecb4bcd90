"""Flask HTTP servers for the gateway and resolver services."""
