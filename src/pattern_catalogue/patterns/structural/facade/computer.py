"""Computer subsystems and the facade that sequences them."""


class CPU:
    def __init__(self):
        self.temperature = 35

    def start(self) -> None:
        print("CPU: Starting processor")
        self.temperature = 45

    def shutdown(self) -> None:
        print("CPU: Shutting down processor")
        self.temperature = 25

    def status(self) -> None:
        print(f"CPU: Temperature {self.temperature}°C")


class Memory:
    def __init__(self, total_memory: int = 16000):
        self.total_memory = total_memory
        self.used_memory = 2000

    def load(self) -> None:
        print("Memory: Loading operating system")
        self.used_memory = 4000

    def free(self) -> None:
        print("Memory: Freeing memory")
        self.used_memory = 1000

    def status(self) -> None:
        print(f"Memory: {self.used_memory}/{self.total_memory} MB used")


class HardDrive:
    def __init__(self, total_space: int = 1000):
        self.total_space = total_space
        self.used_space = 250

    def read(self) -> None:
        print("HardDrive: Reading boot sector")

    def write(self) -> None:
        print("HardDrive: Writing system logs")

    def status(self) -> None:
        print(f"HardDrive: {self.used_space}/{self.total_space} GB used")


class GPU:
    def __init__(self):
        self.load = 0

    def initialize(self) -> None:
        print("GPU: Initializing graphics")
        self.load = 25

    def shutdown(self) -> None:
        print("GPU: Shutting down graphics")
        self.load = 0

    def status(self) -> None:
        print(f"GPU: Load {self.load}%")


class ComputerFacade:
    """
    Start, shut down and inspect the computer without touching its parts.

    Call order is fixed:
    start: cpu, memory, harddrive, gpu
    shutdown: harddrive, memory, gpu, cpu
    status: cpu, memory, harddrive, gpu
    """

    def __init__(self):
        self.cpu = CPU()
        self.memory = Memory()
        self.hard_drive = HardDrive()
        self.gpu = GPU()

    def start(self) -> None:
        print("=== Starting Computer ===")
        self.cpu.start()
        self.memory.load()
        self.hard_drive.read()
        self.gpu.initialize()
        print("Computer started successfully!\n")

    def shutdown(self) -> None:
        print("=== Shutting Down Computer ===")
        self.hard_drive.write()
        self.memory.free()
        self.gpu.shutdown()
        self.cpu.shutdown()
        print("Computer shut down successfully!\n")

    def status(self) -> None:
        print("=== Computer Status ===")
        self.cpu.status()
        self.memory.status()
        self.hard_drive.status()
        self.gpu.status()
        print()
