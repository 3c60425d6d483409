"""Vessel equipment inventory: DynamoDB data-access layer and Lambda functions."""

__version__ = "0.1.0"
