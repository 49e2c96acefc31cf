"""Feature modules for uniconnect."""
