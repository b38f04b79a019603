from .removal import calculate_removal_ratio, route_length_km
