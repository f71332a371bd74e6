"""WhatsApp Cloud CLI."""
