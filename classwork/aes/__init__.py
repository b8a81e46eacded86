"""AES-128 single-block encryption: conventional rounds, T-tables and a command."""