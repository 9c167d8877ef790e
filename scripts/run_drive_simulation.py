import csv
import logging
import os
from typing import List

from geometry import Coordinate
from location import LocationProvider, PermissionStatus, Subscription, WatchOptions
from navigation import CameraDirective, NavigationController
from routing import DirectionsClient, RouteFetcher

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%H:%M:%S",
)

KYIV = Coordinate(50.4501, 30.5234)
LVIV = Coordinate(49.8397, 24.0297)


class ReplaySubscription(Subscription):
    def __init__(self):
        self.removed = False

    def remove(self) -> None:
        self.removed = True


class ReplayLocationProvider(LocationProvider):
    """
    Replays a fixed list of positions as if the device were driving along them.
    """
    def __init__(self, start: Coordinate):
        self.start = start
        self.callbacks = []
        self.subscriptions = []

    def request_foreground_permission(self) -> PermissionStatus:
        return PermissionStatus.GRANTED

    def get_current_position(self) -> Coordinate:
        return self.start

    def watch_position(self, options: WatchOptions, callback) -> Subscription:
        subscription = ReplaySubscription()
        self.callbacks.append(callback)
        self.subscriptions.append(subscription)
        return subscription

    def replay(self, positions: List[Coordinate]) -> None:
        for position in positions:
            for callback, subscription in zip(self.callbacks, self.subscriptions):
                if not subscription.removed:
                    callback(position)


def run_simulation():
    print("=== STARTING DRIVE MODE SIMULATION ===")

    # 1. Configure System
    provider = ReplayLocationProvider(start=KYIV)
    controller = NavigationController(provider, RouteFetcher(DirectionsClient()))

    directives: List[CameraDirective] = []
    controller.add_camera_listener(directives.append)

    # 2. Origin from "GPS", destination from the places search
    controller.locate_origin()
    controller.set_destination(LVIV)

    routes = controller.state.routes
    if not routes:
        print(f"No routes returned: {controller.state.error_message}")
        return

    print("\n--- Route Options ---")
    for i, route in enumerate(routes):
        label = "primary" if i == 0 else "alternative"
        print(f"  [{i}] {label}: {route.distance_text}, {route.duration_text}, "
              f"{len(route.points)} points, label at {route.midpoint}")

    # 3. The user picks the fastest route and starts driving
    chosen = controller.pick_route(0)
    controller.start_drive_mode()

    # Drive along every 10th point of the chosen route
    provider.replay(list(chosen.points[::10]))
    controller.stop_drive_mode()

    # 4. Save camera directives next to the script
    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    output_path = os.path.join(base_dir, "camera_directives.csv")

    with open(output_path, "w", newline='') as file:
        writer = csv.writer(file)
        writer.writerow(["latitude", "longitude", "heading", "pitch", "zoom", "duration_ms"])
        for directive in directives:
            writer.writerow([
                directive.center.latitude,
                directive.center.longitude,
                round(directive.heading, 2),
                directive.pitch,
                directive.zoom,
                directive.duration_ms,
            ])

    print("\n=== SIMULATION COMPLETE ===")
    print(f"Camera directives emitted: {len(directives)}")
    print(f"Results written to '{output_path}'.")

    controller.close()


if __name__ == "__main__":
    run_simulation()
