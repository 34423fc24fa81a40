"""Slack connector: outbound Web API calls and the inbound bolt app."""
