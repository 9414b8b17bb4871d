DATASET = "tank/home"

SNAPSHOTS = [
    "zfs-auto-snap_daily-2024-03-01-0000",
    "zfs-auto-snap_daily-2024-03-02-0000",
    "zfs-auto-snap_daily-2024-03-03-0000",
]

LIST_OUTPUT = "".join(f"{DATASET}@{name}\n" for name in SNAPSHOTS)

DESTROY_OUTPUT = "\n".join(
    [
        "destroy\ttank/home@zfs-auto-snap_daily-2024-03-01-0000",
        "destroy\ttank/home@zfs-auto-snap_daily-2024-03-02-0000",
        "reclaim\t1048576",
        "",
    ]
)

SAMPLE_SIZES = {
    ("s1", "s1"): 0,
    ("s1", "s2"): 100,
    ("s1", "s3"): 300,
    ("s2", "s2"): 0,
    ("s2", "s3"): 150,
    ("s3", "s3"): 0,
}
