"""Core domain logic for issueboard."""
