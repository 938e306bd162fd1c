"""AI Voice Translator Hub - WebRTC signaling relay with live speech translation."""
