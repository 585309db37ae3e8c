class Topics:
    """Centralised Kafka topic definitions"""

    # Product interaction events (view, bookmark, cart_add)
    PRODUCT_EVENTS = "product_events"
