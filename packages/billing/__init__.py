"""
Billing package - handles creator subscriptions and entitlements.

This package integrates with:
- Razorpay: Recurring subscriptions and charge notifications
- Firestore: Creator application records carrying the entitlement fields
"""
