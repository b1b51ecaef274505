"""Infrastructure pieces shared by every context."""
