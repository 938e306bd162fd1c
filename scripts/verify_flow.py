"""
Manual end-to-end check against a running hub.

Connects two clients, relays an offer, then sends an audio file from the
first client and waits for the caption on both sides.

Usage:
    python scripts/verify_flow.py [path/to/16khz_mono.wav]
"""
import asyncio
import httpx
import websockets
import json
import logging
import sys

import os

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

BASE_URL = os.getenv("BASE_URL", "http://localhost:3001")
WS_URL = os.getenv("WS_URL", "ws://localhost:3001")


async def check_health(client):
    resp = await client.get(f"{BASE_URL}/health")
    if resp.status_code != 200:
        logger.error(f"Health check failed: {resp.status_code} {resp.text}")
        return False
    logger.info(f"Health: {resp.json()}")
    return True


async def recv_json(ws, timeout=5.0):
    return json.loads(await asyncio.wait_for(ws.recv(), timeout=timeout))


async def run_scenario(audio_path=None):
    async with httpx.AsyncClient() as client:
        if not await check_health(client):
            return

    async with websockets.connect(f"{WS_URL}/ws") as ws_a, websockets.connect(f"{WS_URL}/ws") as ws_b:
        id_a = (await recv_json(ws_a))["clientId"]
        id_b = (await recv_json(ws_b))["clientId"]
        logger.info(f"Client A: {id_a}, Client B: {id_b}")

        # 1. Offer relay
        offer = {"type": "webrtc-offer", "signalData": {"type": "offer", "sdp": "v=0"}}
        await ws_a.send(json.dumps(offer))
        relayed = await recv_json(ws_b)
        if relayed != offer:
            logger.error(f"Unexpected relay: {relayed}")
            return
        logger.info("SUCCESS: B received A's offer")

        # 2. Caption round trip
        if not audio_path:
            logger.info("No audio file given, skipping translation check")
            return

        with open(audio_path, "rb") as f:
            audio = f.read()
        logger.info(f"Sending {len(audio)} bytes of audio from A...")
        await ws_a.send(audio)

        try:
            for name, ws in (("A", ws_a), ("B", ws_b)):
                event = await recv_json(ws, timeout=30.0)
                if event["type"] == "translation-result":
                    payload = event["payload"]
                    logger.info(f"SUCCESS: {name} got caption: {payload['originalText']} -> {payload['translatedText']}")
                else:
                    logger.error(f"{name} received {event}")
        except asyncio.TimeoutError:
            logger.error("Timeout waiting for translation. Check the hub logs (GCP credentials?)")


if __name__ == "__main__":
    try:
        asyncio.run(run_scenario(sys.argv[1] if len(sys.argv) > 1 else None))
    except KeyboardInterrupt:
        pass
