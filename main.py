from benchmarks.graph_bench import BenchConfig, run_benchmarks
from helpers.benchmark import SAMPLES, med_exec_time


def main() -> None:
    joke = "My software never has bugs. It just develops random features."
    print(med_exec_time(lambda: joke).msg("Joke"))

    config = BenchConfig(
        graph_index=5,
        degree_vertex=6,
        path_source=0,
        path_target=6,
        samples=SAMPLES,
        verbose=True,
    )
    run_benchmarks(config)


if __name__ == "__main__":
    main()
