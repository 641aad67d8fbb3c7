# socialgraph

A small social network. Users have a name, a birth year and a zip code, and
are joined by undirected friendships. The network can be loaded from and
saved to a plain text file. It can also answer questions about its shape:

- the shortest chain of friends between two users,
- a user at exactly a given distance from another,
- friend suggestions ranked by number of mutual friends,
- the groups (connected components) of the network.

Two grid puzzles use the same breadth-first search. One counts islands in a
grid. The other finds the shortest clear path through a binary matrix.

## Installing

```
pip install .
```

The package has no dependencies outside the standard library. It needs
Python 3.10 or later.

## The network file

The first line holds the number of users. Each user then takes five lines:

1. Its id. Ids run 0, 1, 2, ... in order.
2. A tab, then the full name.
3. A tab, then the birth year.
4. A tab, then the zip code.
5. A tab, then the space-separated ids of its friends.

```
2
0
	Jason Chen
	2001
	95053
	1
1
	Aled Montes
	2000
	95050
	0
```

`Network.read_users` replaces the network with the contents of the file. If
the file cannot be opened, it keeps no users at all. If the file is
malformed, for example a missing line or an id out of order, it keeps only
the users read before the problem, and those users have no friendships.

Friend ids that are out of range are ignored. A friendship only has to be
listed on one side to be added to both.

`Network.write_users` writes the same format, with each user's friends in
ascending order.

## Using the library

```python
from socialgraph.network import Network
from socialgraph.user import User

net = Network()
net.read_users("users.txt")

net.add_user(User(len(net), "Leo Griffin", 1999, 95051))
net.add_connection("Aled Montes", "Leo Griffin")

source = net.get_id("Jason Chen")
target = net.get_id("Leo Griffin")
print(net.shortest_path(source, target))   # [0, 1, 2]
print(net.groups())                        # [[0, 1, 2]]

net.write_users("users_new.txt")
```

### `User`

`socialgraph.user.User` is a dataclass with these fields:

| Field | Default |
| --- | --- |
| `id` | `0` |
| `name` | `""` |
| `year` | `1934` |
| `zip_code` | `89591` |
| `friends` | an empty set of ids |

`add_friend` and `delete_friend` add and remove a friend id. Adding a friend
who is already there does nothing. Removing an id that is not there does
nothing.

### `Network`

`socialgraph.network.Network` holds users whose id equals their position.

- `add_user(user)` appends the user only if `user.id == len(network)`.
  Otherwise it ignores the user.
- `get_user(user_id)` returns the user, or `None` when the id is out of
  range.
- `get_id(name)` returns the id of the first user with that name.
- `add_connection(name1, name2)` adds a friendship between two named users.
- `delete_connection(name1, name2)` removes a friendship between two named
  users.
- `len(network)` gives the number of users.
- Iterating over the network yields the users in id order.

The following methods take user ids:

- `shortest_path(source, target)` returns the ids along a shortest chain of
  friends. The list is `[source]` when both ids are the same, and empty when
  the two users are not connected.
- `distance_user(source, distance)` returns a pair `(user_id, path)` for
  some user exactly `distance` steps away. It returns `None` when there is no
  such user.
- `suggest_friends(who)` returns a pair `(suggestions, score)`. The
  suggestions are the users, other than `who`, who are not already its
  friends and who share the most friends with it. `score` is that number of
  shared friends. The list is empty and the score is 0 when nobody shares a
  friend.
- `groups()` returns the connected groups, ordered by their lowest id.

Some calls raise `socialgraph.network.UnknownUserError`, a subclass of
`LookupError`:

- `get_id` and the two connection methods, for a name that is not in the
  network;
- the id-based queries, for an id that is out of range.

### Grids

The grid helpers live in `socialgraph.grids`:

```python
from socialgraph.grids import num_islands, shortest_path_binary_matrix

num_islands([["1", "1", "0"], ["0", "0", "1"]])          # 2
shortest_path_binary_matrix([[0, 1], [1, 0]])            # 2
```

`num_islands` counts groups of `"1"` cells that touch horizontally or
vertically.

`shortest_path_binary_matrix` takes a square grid. It returns the number of
cells on the shortest path of `0` cells from the top-left corner to the
bottom-right corner, moving in any of the eight directions. It returns `-1`
when there is no such path, and it leaves the grid unchanged.

## The interactive menu

```
socialgraph users.txt
```

This loads the file, prints the menu, and reads one command per line from
standard input:

```
1 <First Last> <Year> <Zip>    add a user
2 <First Last> <First Last>    add a friend connection
3 <First Last> <First Last>    delete a friend connection
4 <filename>                   write the network to a file
```

Confirmations go to standard output, and error messages go to standard
error. A command with missing or malformed arguments prints an example of
the right form. Deleting a connection between users who are not friends is
reported as an error.

Blank lines are skipped. Any other number, a line that does not start with
a number, or the end of input ends the session.

Run without a file name, the command prints a usage line and exits with
status 1. The same loop is available as `socialgraph.cli.run_menu(network,
lines, out, err)`.

## What it does not do

The menu only edits and saves the network. Shortest paths, distance
queries, friend suggestions and groups are available only through the
`Network` class, not as menu commands.