"""Services: workflows spanning more than one repository call (accounts, bootstrap)."""
