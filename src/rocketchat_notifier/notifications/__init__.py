from rocketchat_notifier.notifications.rocketchat import RocketChatNotifier, build_payload, render_response

__all__ = ["RocketChatNotifier", "build_payload", "render_response"]
