"""Backend for the portfolio site: projects, skills, contact form and health."""
