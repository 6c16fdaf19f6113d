"""retailhub: retail and finance REST backend."""
