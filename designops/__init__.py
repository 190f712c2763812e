"""DesignOps admin backend: job, artwork log and lookup management."""
