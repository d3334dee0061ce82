"""Services: credential loading, GitLab access, report writing."""
