"""Domain packages for the journal app."""
