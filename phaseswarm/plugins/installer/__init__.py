"""Install the assistant command templates and create the project registry."""
