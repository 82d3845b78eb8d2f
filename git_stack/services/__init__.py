"""Services for git-stack."""
