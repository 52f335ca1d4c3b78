import time

from zip_bench import BenchConfig, ElapsedTimer, run_benchmark
from zip_bench.report import print_result


# Only the sleeps outside excluded() are counted
timer = ElapsedTimer()
timer.start()
for _ in range(3):
    time.sleep(0.01)
    with timer.excluded():
        time.sleep(0.05)
timer.pause()
print(f"measured: {timer}")


# Package ./no_metadata_large.png three times into ./output.zip
result = run_benchmark(BenchConfig(iterations=3))
print_result(result, verbose=True)
