"""Per-user, per-provider OAuth token storage and credential lookup."""
