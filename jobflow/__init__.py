"""JobFlow - job application tracking backend."""
