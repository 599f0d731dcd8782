from __future__ import annotations

"""
Pattern Demonstration Scenarios.

Each function replays the fixed client scenario of one structural pattern,
writing every produced line to the supplied emitter.
"""

from typing import Callable, Dict, List

from structural_patterns.patterns.adapter import (
    ArmenianMenuAdapter,
    ArmenianRestaurantAPI,
    ItalianMenuAdapter,
    ItalianRestaurantAPI,
    JapaneseMenuAdapter,
    JapaneseRestaurantAPI,
    OnlineMenuApp,
)
from structural_patterns.patterns.bridge import (
    EmailSender,
    LazyMessage,
    PushSender,
    SimpleMessage,
    SMSSender,
    UrgentMessage,
)
from structural_patterns.patterns.composite import File, Folder
from structural_patterns.patterns.decorator import (
    Coffee,
    CoffeeComponent,
    MilkDecorator,
    SugarDecorator,
)
from structural_patterns.patterns.facade import FileSystemFacade
from structural_patterns.patterns.flyweight import TreeFactory
from structural_patterns.patterns.output import Emitter
from structural_patterns.patterns.proxy import ImageProxy, RealImage

DemoFn = Callable[[Emitter], None]


# -----------------------------------------------------------------------------
# SCENARIOS
# -----------------------------------------------------------------------------

def flyweight_demo(emit: Emitter) -> None:
    factory = TreeFactory(emit=emit)

    placements = [
        ("Oak", "Green", 10, 20),
        ("Pine", "Dark Green", 15, 25),
        ("Oak", "Green", 20, 30),
        ("Oak", "Green", 25, 35),
        ("Pine", "Dark Green", 30, 40),
    ]
    for tree_type, color, x, y in placements:
        factory.get_tree(tree_type, color).display(x, y)

    emit("")
    emit(f"Total unique Tree objects created: {factory.get_unique_tree_count()}")


def proxy_demo(emit: Emitter) -> None:
    RealImage.reset_loaded_count()

    image1 = ImageProxy("photo1.jpg", emit=emit)
    image2 = ImageProxy("photo2.jpg", emit=emit)

    emit("Images created. No loading yet.")
    emit("")

    image1.display()
    image1.display()
    image2.display()

    emit("")
    emit(f"Total real images loaded: {RealImage.loaded_images_count}")


def composite_demo(emit: Emitter) -> None:
    file1 = File("file1.txt")
    file2 = File("file2.txt")
    file3 = File("file3.txt")
    file4 = File("file4.txt")

    documents = Folder("Documents")
    images = Folder("Images")
    root = Folder("Root")

    documents.add(file1)
    documents.add(file2)
    documents.add(file4)
    images.add(file3)

    root.add(documents)
    root.add(images)

    emit("=== File System Before Removal ===")
    root.display(emit=emit)

    documents.remove(file4)

    emit("File System After Removal of file4.txt")
    root.display(emit=emit)


def adapter_demo(emit: Emitter) -> None:
    app = OnlineMenuApp(emit=emit)
    app.add_menu(ItalianMenuAdapter(ItalianRestaurantAPI()))
    app.add_menu(JapaneseMenuAdapter(JapaneseRestaurantAPI()))
    app.add_menu(ArmenianMenuAdapter(ArmenianRestaurantAPI()))
    app.show_all_menus()


def decorator_demo(emit: Emitter) -> None:
    coffees: List[CoffeeComponent] = [
        Coffee(),
        MilkDecorator(Coffee()),
        SugarDecorator(Coffee()),
        SugarDecorator(MilkDecorator(Coffee())),
    ]
    for coffee in coffees:
        emit(f"{coffee.get_description()} {coffee.get_cost()} AMD")


def facade_demo(emit: Emitter) -> None:
    fs_app = FileSystemFacade(emit=emit)
    fs_app.create_file("example.txt", "Hello Facade Pattern!")
    fs_app.read_file("example.txt")
    fs_app.delete_file("example.txt")


def bridge_demo(emit: Emitter) -> None:
    UrgentMessage(SMSSender(emit)).send("Server is down!")
    LazyMessage(EmailSender(emit)).send("Meeting at 3PM")
    SimpleMessage(PushSender(emit)).send("Hello, user!")


# -----------------------------------------------------------------------------
# REGISTRY
# -----------------------------------------------------------------------------

DEMOS: Dict[str, DemoFn] = {
    "flyweight": flyweight_demo,
    "proxy": proxy_demo,
    "composite": composite_demo,
    "adapter": adapter_demo,
    "decorator": decorator_demo,
    "facade": facade_demo,
    "bridge": bridge_demo,
}
