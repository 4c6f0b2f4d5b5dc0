"""Basic example: list the users, then create one."""

from udshttp import UsersClient

client = UsersClient("mysock.sock")

print("Users:", client.get_users())

user = client.create_user("Jack")
print(f"Created {user.name} with id {user.id}")
