"""WordPress blog content API."""
