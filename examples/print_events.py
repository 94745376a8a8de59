"""Example: print every event a connected ReMOTE 25SL produces.

This example demonstrates:
- Recognizing the 25SL's ports by name
- Decoding messages in mido's callback thread
- Handing events to the main thread through a queue

Port handling lives here, in the caller; the decoder only sees messages.
"""

import logging
import queue

import mido

from remote25sl import InputPort, decode_message

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


def main():
    """Open every 25SL input port and print decoded events until Ctrl+C."""
    events = queue.Queue()
    inputs = []

    for name in mido.get_input_names():
        port = InputPort.from_name(name)
        if port is None:
            continue

        def callback(msg, port=port):
            event = decode_message(msg, port)
            if event is not None:
                events.put(event)

        inputs.append(mido.open_input(name, callback=callback))
        logger.info(f"Listening on {name} ({port.value})")

    if not inputs:
        logger.error("No ReMOTE 25SL ports found. Is the controller connected?")
        return

    try:
        while True:
            print(events.get())
    except KeyboardInterrupt:
        logger.info("Stopping")
    finally:
        for inp in inputs:
            inp.close()


if __name__ == "__main__":
    main()
