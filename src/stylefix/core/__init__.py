"""Configuration, logging and error types shared by stylefix."""
