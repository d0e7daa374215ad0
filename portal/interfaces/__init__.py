"""Interface adapters exposing the portal to the outside world."""
