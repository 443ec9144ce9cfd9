"""Install Docker, tune the kernel and launch a Graylog stack on a Debian host."""
