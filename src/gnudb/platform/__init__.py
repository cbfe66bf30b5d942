"""Infrastructure: transports, the CDDBP connection, HTTP access and logging."""
