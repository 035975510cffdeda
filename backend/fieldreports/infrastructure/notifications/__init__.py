from .slack_notifier import SlackFaultCodeNotifier

__all__ = ["SlackFaultCodeNotifier"]
