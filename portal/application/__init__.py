"""Application layer: business operations over the repositories."""
