import logging
import random

from windward import Environment, VoyageSimulation, create_vessel
from windward.environment import LandChecker, OceanDataProcessor, WindDataProcessor

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)

# Load environment data
wind_path = "wind_data/2024-01-01_2024-01-31_50.0_40.0_-5.0_-15.0_ERA5_data.grib"
ocean_path = "ocean_data/2024-01_currents_ice.nc"

environment = Environment(
    water=LandChecker(),
    wind=WindDataProcessor(wind_path),
    ocean=OceanDataProcessor(ocean_path),
)

vessel = create_vessel(45.0, -10.0, category=1)
vessel.launch()

sim = VoyageSimulation(vessel, environment, start_time=environment.wind.times[0])
states = sim.run_simulation(
    duration=48 * 3600,
    get_course_func=lambda state: random.uniform(0, 360),
    time_step=600,
)

final = states[-1]
print(f"Final position: {final['position']}")
print(f"Distance travelled: {final['distance_travelled'] / 1852:.1f} nm")
