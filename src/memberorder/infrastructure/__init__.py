"""Infrastructure layer: text scanning engine and adapters."""
