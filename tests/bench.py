import time
from algorithms.boyer_moore import iter_steps, search

text = "ACGT" * 1_000 + "GATTACA"
pat = "GATTACA"

for name, fn in [("search (eager)", search), ("iter_steps (lazy)", lambda t, p: list(iter_steps(t, p)))]:
    t0 = time.time()
    _ = fn(text, pat)
    print(name, "secs:", round(time.time()-t0, 4))

print("Trace length for a miss")
print(len(search("ACGT" * 1_000, "TTTT")[1]))
