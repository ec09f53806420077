from command_executor.cli import run

if __name__ == "__main__":
    run()
