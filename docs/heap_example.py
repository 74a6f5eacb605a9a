# setup
from capheap.boundaries import QueueFull
from capheap.heap import BoundedMaxHeap
from capheap.ordering import byKey, reverseOrder

jobs: BoundedMaxHeap[tuple[int, str]] = BoundedMaxHeap(
    3, byKey(lambda job: job[0])
)
# end setup

# fill
jobs.insert((2, "write report"))
jobs.insert((9, "fix outage"))
jobs.insert((5, "review patch"))
try:
    jobs.insert((1, "water plants"))
except QueueFull as full:
    print(f"no room: {full}")
# end fill

# drain
for priority, name in jobs.drain():
    print(priority, name)
# end drain

# smallest
smallest = BoundedMaxHeap.fromIterable([7, 3, 11], order=reverseOrder())
print(smallest.peek())
# end smallest
