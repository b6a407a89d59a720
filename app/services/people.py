from app.models.person import Person
from app.services.crud import CrudResource


# people have nothing depending on them, so destroy is never blocked
people = CrudResource(
    model=Person,
    label="person",
    order_by=(Person.name,),
)
