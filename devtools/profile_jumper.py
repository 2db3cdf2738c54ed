"""
Quick profiler for startup time, which matters since `jp` runs jumper on every jump.
"""

import cProfile
import pstats

from jumper.main import main


def entrypoint():
    main(["list"])


if __name__ == "__main__":
    cProfile.run("entrypoint()", "python_profile")

    p = pstats.Stats("python_profile")
    p.sort_stats("time").print_stats(30)
