"""Application layer - ports and the Acl service."""
