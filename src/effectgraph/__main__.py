from effectgraph.cli import app


def _run():
    app()


if __name__ == "__main__":
    _run()
