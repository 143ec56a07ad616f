"""Shipping bounded context: shipment lifecycle, fees and tracking.

Tracks shipments from creation through transit to delivery (or loss),
prices them with a pluggable fee policy and keeps them in a keyed store.
"""
