"""Slack Integration Package.

This package contains the Slack integration modules. Contains:

- client: Singleton Slack WebClient built from the configured bot token.
- users: Module containing the user related functionality for the Slack integration.
- messages: Module posting messages via chat.postMessage or an incoming webhook.
"""
