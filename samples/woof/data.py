"""The static dog catalog.  Order here is display order."""

from __future__ import annotations

from .models import Dog

DOGS: tuple[Dog, ...] = (
    Dog(name="dog_name_1", age=2, image="koda", hobby_description="dog_description_1"),
    Dog(name="dog_name_2", age=16, image="lola", hobby_description="dog_description_2"),
    Dog(name="dog_name_3", age=2, image="frankie", hobby_description="dog_description_3"),
    Dog(name="dog_name_4", age=8, image="nox", hobby_description="dog_description_4"),
    Dog(name="dog_name_5", age=8, image="faye", hobby_description="dog_description_5"),
    Dog(name="dog_name_6", age=14, image="bella", hobby_description="dog_description_6"),
    Dog(name="dog_name_7", age=2, image="moana", hobby_description="dog_description_7"),
    Dog(name="dog_name_8", age=7, image="tzeitel", hobby_description="dog_description_8"),
    Dog(name="dog_name_9", age=4, image="leroy", hobby_description="dog_description_9"),
)
