"""cfurl: open Cloudflare dashboard pages from the terminal."""

__version__ = "0.1.0"
