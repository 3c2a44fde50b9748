"""Notification service package.

Consumes domain events from the booking, training and achievement services
and turns them into email and in-app notifications.
"""
