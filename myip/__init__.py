# myip/__init__.py
"""
myip reports the IPv6 (or IPv4) address of this host, either as bound to the
local network interfaces or as seen by remote "what is my IP" services.
"""

__version__ = "0.1.0"
