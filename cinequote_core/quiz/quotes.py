from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class QuoteRecord:
    quote: str
    character: str
    movie: str
    year: int


QUOTES: tuple[QuoteRecord, ...] = (
    QuoteRecord("Frankly, my dear, I don't give a damn.", "Rhett Butler", "Gone with the Wind", 1939),
    QuoteRecord("I'm gonna make him an offer he can't refuse.", "Vito Corleone", "The Godfather", 1972),
    QuoteRecord("You don't understand! I coulda had class. I coulda been a contender.", "Terry Malloy", "On the Waterfront", 1954),
    QuoteRecord("Toto, I've a feeling we're not in Kansas anymore.", "Dorothy Gale", "The Wizard of Oz", 1939),
    QuoteRecord("Here's looking at you, kid.", "Rick Blaine", "Casablanca", 1942),
    QuoteRecord("Go ahead, make my day.", "Harry Callahan", "Sudden Impact", 1983),
    QuoteRecord("All right, Mr. DeMille, I'm ready for my close-up.", "Norma Desmond", "Sunset Boulevard", 1950),
    QuoteRecord("May the Force be with you.", "Han Solo", "Star Wars", 1977),
    QuoteRecord("Fasten your seatbelts. It's going to be a bumpy night.", "Margo Channing", "All About Eve", 1950),
    QuoteRecord("You talking to me?", "Travis Bickle", "Taxi Driver", 1976),
    QuoteRecord("What we've got here is failure to communicate.", "Captain", "Cool Hand Luke", 1967),
    QuoteRecord("I love the smell of napalm in the morning.", "Lt. Col. Bill Kilgore", "Apocalypse Now", 1979),
    QuoteRecord("Love means never having to say you're sorry.", "Jennifer Cavalleri", "Love Story", 1970),
    QuoteRecord("The stuff that dreams are made of.", "Sam Spade", "The Maltese Falcon", 1941),
    QuoteRecord("E.T. phone home.", "E.T.", "E.T. the Extra-Terrestrial", 1982),
    QuoteRecord("They call me Mister Tibbs!", "Virgil Tibbs", "In the Heat of the Night", 1967),
    QuoteRecord("Rosebud.", "Charles Foster Kane", "Citizen Kane", 1941),
    QuoteRecord("Made it, Ma! Top of the world!", "Cody Jarrett", "White Heat", 1949),
    QuoteRecord("I'm as mad as hell, and I'm not going to take this anymore!", "Howard Beale", "Network", 1976),
    QuoteRecord("Louis, I think this is the beginning of a beautiful friendship.", "Rick Blaine", "Casablanca", 1942),
    QuoteRecord("A census taker once tried to test me. I ate his liver with some fava beans and a nice chianti.", "Hannibal Lecter", "The Silence of the Lambs", 1991),
    QuoteRecord("Bond. James Bond.", "James Bond", "Dr. No", 1962),
    QuoteRecord("There's no place like home.", "Dorothy Gale", "The Wizard of Oz", 1939),
    QuoteRecord("I am big! It's the pictures that got small.", "Norma Desmond", "Sunset Boulevard", 1950),
    QuoteRecord("Show me the money!", "Rod Tidwell", "Jerry Maguire", 1996),
    QuoteRecord("Why don't you come up sometime and see me?", "Lady Lou", "She Done Him Wrong", 1933),
    QuoteRecord("I'm walking here! I'm walking here!", "Ratso Rizzo", "Midnight Cowboy", 1969),
    QuoteRecord("Play it, Sam. Play 'As Time Goes By.'", "Ilsa Lund", "Casablanca", 1942),
    QuoteRecord("You can't handle the truth!", "Col. Nathan R. Jessup", "A Few Good Men", 1992),
    QuoteRecord("I want to be alone.", "Grusinskaya", "Grand Hotel", 1932),
    QuoteRecord("After all, tomorrow is another day!", "Scarlett O'Hara", "Gone with the Wind", 1939),
    QuoteRecord("Round up the usual suspects.", "Captain Louis Renault", "Casablanca", 1942),
    QuoteRecord("I'll have what she's having.", "Customer", "When Harry Met Sally...", 1989),
    QuoteRecord("You know how to whistle, don't you, Steve? You just put your lips together and blow.", "Marie Browning", "To Have and Have Not", 1944),
    QuoteRecord("You're gonna need a bigger boat.", "Martin Brody", "Jaws", 1975),
    QuoteRecord("Badges? We ain't got no badges! We don't need no badges!", "Gold Hat", "The Treasure of the Sierra Madre", 1948),
    QuoteRecord("I'll be back.", "The Terminator", "The Terminator", 1984),
    QuoteRecord("Today, I consider myself the luckiest man on the face of the earth.", "Lou Gehrig", "The Pride of the Yankees", 1942),
    QuoteRecord("If you build it, he will come.", "Shoeless Joe Jackson", "Field of Dreams", 1989),
    QuoteRecord("My mama always said life was like a box of chocolates. You never know what you're gonna get.", "Forrest Gump", "Forrest Gump", 1994),
    QuoteRecord("We rob banks.", "Clyde Barrow", "Bonnie and Clyde", 1967),
    QuoteRecord("Plastics.", "Mr. McGuire", "The Graduate", 1967),
    QuoteRecord("We'll always have Paris.", "Rick Blaine", "Casablanca", 1942),
    QuoteRecord("I see dead people.", "Cole Sear", "The Sixth Sense", 1999),
    QuoteRecord("Stella! Hey, Stella!", "Stanley Kowalski", "A Streetcar Named Desire", 1951),
    QuoteRecord("Oh, Jerry, don't let's ask for the moon. We have the stars.", "Charlotte Vale", "Now, Voyager", 1942),
    QuoteRecord("Shane. Shane. Come back!", "Joey Starrett", "Shane", 1953),
    QuoteRecord("Well, nobody's perfect.", "Osgood Fielding III", "Some Like It Hot", 1959),
    QuoteRecord("It's alive! It's alive!", "Henry Frankenstein", "Frankenstein", 1931),
    QuoteRecord("Houston, we have a problem.", "Jim Lovell", "Apollo 13", 1995),
    QuoteRecord("You've got to ask yourself one question: 'Do I feel lucky?' Well, do ya, punk?", "Harry Callahan", "Dirty Harry", 1971),
    QuoteRecord("You had me at 'hello.'", "Dorothy Boyd", "Jerry Maguire", 1996),
    QuoteRecord("One morning I shot an elephant in my pajamas. How he got in my pajamas, I don't know.", "Captain Geoffrey T. Spaulding", "Animal Crackers", 1930),
    QuoteRecord("There's no crying in baseball!", "Jimmy Dugan", "A League of Their Own", 1992),
    QuoteRecord("La-dee-da, la-dee-da.", "Annie Hall", "Annie Hall", 1977),
    QuoteRecord("A boy's best friend is his mother.", "Norman Bates", "Psycho", 1960),
    QuoteRecord("Greed, for lack of a better word, is good.", "Gordon Gekko", "Wall Street", 1987),
    QuoteRecord("Keep your friends close, but your enemies closer.", "Michael Corleone", "The Godfather Part II", 1974),
    QuoteRecord("As God is my witness, I'll never be hungry again.", "Scarlett O'Hara", "Gone with the Wind", 1939),
    QuoteRecord("Well, here's another nice mess you've gotten me into!", "Oliver", "Sons of the Desert", 1933),
    QuoteRecord("Say 'hello' to my little friend!", "Tony Montana", "Scarface", 1983),
    QuoteRecord("What a dump.", "Rosa Moline", "Beyond the Forest", 1949),
    QuoteRecord("Mrs. Robinson, you're trying to seduce me. Aren't you?", "Benjamin Braddock", "The Graduate", 1967),
    QuoteRecord("Gentlemen, you can't fight in here! This is the War Room!", "President Merkin Muffley", "Dr. Strangelove", 1964),
    QuoteRecord("Elementary, my dear Watson.", "Sherlock Holmes", "The Adventures of Sherlock Holmes", 1939),
    QuoteRecord("Take your stinking paws off me, you damned dirty ape.", "George Taylor", "Planet of the Apes", 1968),
    QuoteRecord("Of all the gin joints in all the towns in all the world, she walks into mine.", "Rick Blaine", "Casablanca", 1942),
    QuoteRecord("Here's Johnny!", "Jack Torrance", "The Shining", 1980),
    QuoteRecord("They're here!", "Carol Anne Freeling", "Poltergeist", 1982),
    QuoteRecord("Is it safe?", "Dr. Christian Szell", "Marathon Man", 1976),
    QuoteRecord("Wait a minute, wait a minute. You ain't heard nothin' yet!", "Jakie Rabinowitz", "The Jazz Singer", 1927),
    QuoteRecord("No wire hangers, ever!", "Joan Crawford", "Mommie Dearest", 1981),
    QuoteRecord("Mother of mercy, is this the end of Rico?", "Rico Bandello", "Little Caesar", 1931),
    QuoteRecord("Forget it, Jake, it's Chinatown.", "Lawrence Walsh", "Chinatown", 1974),
    QuoteRecord("Have you ever danced with the devil in the pale moonlight?", "The Joker", "Batman", 1989),
    QuoteRecord("Soylent Green is people!", "Detective Robert Thorn", "Soylent Green", 1973),
    QuoteRecord("Open the pod bay doors, please, HAL.", "Dave Bowman", "2001: A Space Odyssey", 1968),
    QuoteRecord("Striker: Surely you can't be serious. Rumack: I am serious... and don't call me Shirley.", "Dr. Rumack", "Airplane!", 1980),
    QuoteRecord("Yo, Adrian!", "Rocky Balboa", "Rocky", 1976),
    QuoteRecord("Hello, gorgeous.", "Fanny Brice", "Funny Girl", 1968),
    QuoteRecord("Toga! Toga!", "John 'Bluto' Blutarsky", "National Lampoon's Animal House", 1978),
    QuoteRecord("Listen to them. Children of the night. What music they make.", "Count Dracula", "Dracula", 1931),
    QuoteRecord("Oh, no, it wasn't the airplanes. It was Beauty killed the Beast.", "Carl Denham", "King Kong", 1933),
    QuoteRecord("My precious.", "Gollum", "The Lord of the Rings: The Two Towers", 2002),
    QuoteRecord("Attica! Attica!", "Sonny Wortzik", "Dog Day Afternoon", 1975),
    QuoteRecord("Sawyer, you're going out a youngster, but you've got to come back a star!", "Julian Marsh", "42nd Street", 1933),
    QuoteRecord("Listen to me, mister. You're my knight in shining armor.", "Ethel Thayer", "On Golden Pond", 1981),
    QuoteRecord("Tell 'em to go out there with all they got and win just one for the Gipper.", "Knute Rockne", "Knute Rockne, All American", 1940),
    QuoteRecord("A martini. Shaken, not stirred.", "James Bond", "Goldfinger", 1964),
    QuoteRecord("Who's on first.", "Dexter", "The Naughty Nineties", 1945),
    QuoteRecord("Cinderella story. Outta nowhere. A former greenskeeper, now, about to become the Masters champion.", "Carl Spackler", "Caddyshack", 1980),
    QuoteRecord("Life is a banquet, and most poor suckers are starving to death!", "Mame Dennis", "Auntie Mame", 1958),
    QuoteRecord("I feel the need - the need for speed!", "Pete 'Maverick' Mitchell", "Top Gun", 1986),
    QuoteRecord("Carpe diem. Seize the day, boys. Make your lives extraordinary.", "John Keating", "Dead Poets Society", 1989),
    QuoteRecord("Snap out of it!", "Loretta Castorini", "Moonstruck", 1987),
    QuoteRecord("My mother thanks you. My father thanks you. My sister thanks you. And I thank you.", "George M. Cohan", "Yankee Doodle Dandy", 1942),
    QuoteRecord("Nobody puts Baby in a corner.", "Johnny Castle", "Dirty Dancing", 1987),
    QuoteRecord("I'll get you, my pretty, and your little dog, too!", "Wicked Witch of the West", "The Wizard of Oz", 1939),
    QuoteRecord("I'm the king of the world!", "Jack Dawson", "Titanic", 1997),
    QuoteRecord("Hasta la vista, baby.", "The Terminator", "Terminator 2: Judgment Day", 1991),
)


def quote_at(index: int) -> QuoteRecord:
    """Return the quote at `index`, wrapping around the table."""

    return QUOTES[index % len(QUOTES)]


def masked_quote(record: QuoteRecord, *, keep_words: int = 3) -> str:
    """Question prompt: leading words of the quote followed by an ellipsis."""

    if keep_words <= 0:
        raise ValueError("keep_words must be > 0")
    words = record.quote.split()
    if len(words) <= keep_words:
        return f"{words[0]} ..." if len(words) > 1 else "..."
    return " ".join(words[:keep_words]) + " ..."
