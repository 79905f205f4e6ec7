"""Route plugins discovered through the imscale.routes entry-point group."""
