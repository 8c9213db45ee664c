import itertools
import logging

from quacker import (
    EventBus,
    Message,
    QuackCounter,
    Timeline,
)
from quacker.message import generate_message_id


def main(id_generator=generate_message_id):
    logging.basicConfig()

    # prepare read side before any command
    bus = EventBus()
    counter = QuackCounter()
    timeline = Timeline()
    bus.subscribe(counter)
    bus.subscribe(timeline)

    hello = Message.quack(bus, "Hello", id_generator=id_generator)
    Message.quack(bus, "World", id_generator=id_generator)

    # each command replays history from the log
    Message.load(bus, hello.id).delete(bus)
    Message.load(bus, hello.id).delete(bus)

    for event in bus.events:
        print(event)
    print(f"quacks: {counter.nb}")
    for message in timeline.messages:
        print(f"- {message.content}")
    return bus, counter, timeline


if __name__ == "__main__":
    main(id_generator=map(str, itertools.count(1)).__next__)
