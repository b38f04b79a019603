import os
import sys
import csv
import argparse
from datetime import datetime
import matplotlib.pyplot as plt

# Add project root to sys.path to find packages
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.join(current_dir, "..")
sys.path.append(os.path.join(project_root, "src"))

from routeclean.config import SPEED_LIMIT_KMPH, TIGHT_ANGLE_DEG, FilterConfig
from routeclean.core.stream import CsvPointReader
from routeclean.metrics import calculate_removal_ratio, route_length_km
from routeclean.modules.route_filter.filter import RouteFilter

def save_points(path, points):
    with open(path, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(["lat", "lon", "timestamp"])
        for p in points:
            writer.writerow(p.tuple)

def main():
    parser = argparse.ArgumentParser(description="Demonstrate online GPS route cleaning.")
    parser.add_argument(
        "--input",
        type=str,
        default=os.path.join(project_root, "data", "raw", "reference_route.csv"),
        help="Path to a headerless lat,lon,timestamp CSV file."
    )
    parser.add_argument("--tight-angle", type=float, default=TIGHT_ANGLE_DEG)
    parser.add_argument("--speed-limit", type=float, default=SPEED_LIMIT_KMPH)
    args = parser.parse_args()
    data_path = args.input

    if not os.path.exists(data_path):
        print(f"Error: Input file {data_path} not found.")
        sys.exit(1)

    print(f"Loading data from {data_path}...")
    raw_points = list(CsvPointReader(data_path).stream())
    print(f"Loaded {len(raw_points)} points.")
    if not raw_points:
        return

    config = FilterConfig(tight_angle_deg=args.tight_angle, speed_limit_kmph=args.speed_limit)
    route_filter = RouteFilter(config)
    cleaned_points = route_filter.process(raw_points)
    error_points = route_filter.error_points

    ratio = calculate_removal_ratio(len(raw_points), len(cleaned_points))
    raw_length = route_length_km(raw_points)
    cleaned_length = route_length_km(cleaned_points)

    print("Metrics:")
    print(f" - Kept Points: {len(cleaned_points)} (Original: {len(raw_points)})")
    print(f" - Removed: {len(error_points)} ({ratio:.1%})")
    print(f" - Route Length: {cleaned_length:.3f} km (Original: {raw_length:.3f} km)")

    script_name = "demo_clean_route"
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    input_filename = os.path.splitext(os.path.basename(data_path))[0]
    output_dir = os.path.join(project_root, "data", "processed", script_name, f"{timestamp}_{input_filename}")
    os.makedirs(output_dir, exist_ok=True)

    cleaned_csv = os.path.join(output_dir, "cleaned_route.csv")
    print(f"Saving cleaned route to {cleaned_csv}...")
    save_points(cleaned_csv, cleaned_points)

    errors_csv = os.path.join(output_dir, "error_points.csv")
    print(f"Saving rejected points to {errors_csv}...")
    save_points(errors_csv, error_points)

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(20, 10))

    ax1.plot([p.lon for p in raw_points], [p.lat for p in raw_points], '-o', color='blue', markersize=4, alpha=0.6, label='GPS Fixes')
    if error_points:
        ax1.scatter([p.lon for p in error_points], [p.lat for p in error_points], color='red', s=60, zorder=5, label='Rejected')
    ax1.set_title(f"Raw GPS Route ({input_filename})")
    ax1.set_xlabel("Longitude")
    ax1.set_ylabel("Latitude")
    ax1.legend()

    ax2.plot([p.lon for p in cleaned_points], [p.lat for p in cleaned_points], '-o', color='green', markersize=4, label='Cleaned Route')
    ax2.set_title(f"Cleaned Route ({input_filename})")
    ax2.set_xlabel("Longitude")
    ax2.set_ylabel("Latitude")
    ax2.legend()

    plt.tight_layout()
    output_img = os.path.join(output_dir, "plot.png")
    plt.savefig(output_img, dpi=150, bbox_inches='tight')
    print(f"Visualization saved to {output_img}")

    print("Done!")

if __name__ == "__main__":
    main()
