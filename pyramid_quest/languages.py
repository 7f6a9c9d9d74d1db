"""Localised text tables for the game, one per supported language."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache


class Language(Enum):
    """Languages the game can be played in."""

    ITALIAN = "it"
    ENGLISH = "en"


@dataclass(frozen=True)
class Texts:
    """Every piece of text the game shows, in one language."""

    # errors
    file_not_found: str
    sort_ending_error: str
    saving_final_error: str
    cin_clear_error: str
    invalid_choice: str

    # menu titles
    main_menu: str
    option_menu: str

    # main menu entries: new game, continue, options, quit
    main_options: tuple[str, str, str, str]
    main_menu_error: str

    # new game confirmation
    new_game_prompt: str
    new_game_choices: tuple[str, str]

    # wiping saves
    wipe_success: str
    wipe_failure: str

    # option menu entries: back, finals, language, delete saves
    option_choices: tuple[str, str, str, str]
    option_menu_error: str

    # finals listing
    finals_known: tuple[str, str, str, str, str]
    finals_hidden: tuple[str, str, str, str, str]
    status_completed: str
    status_incomplete: str

    # unlocked finals counters
    unlocked_finals_summary: str
    unlocked_finals_after_game: str

    # language menu
    language_menu: str
    language_choices: tuple[str, str]
    language_error: str

    goodbye: str
    introduction: str

    # "press enter" prompts
    wait: str
    wait_menu_return: str
    wait_options: str

    # story
    game_texts: tuple[str, ...]
    tasks: tuple[str, ...]
    choices: tuple[tuple[str, str], ...]

    # timed choice
    too_late: str
    get_ready: str

    # endings: basic, good, bad, death, lost
    ending_texts: tuple[str, str, str, str, str]

    # credits
    thanks_for_playing: str
    game_dev: str


@lru_cache(maxsize=None)
def english() -> Texts:
    """Return the English text table."""
    return Texts(
        file_not_found="FILE NOT FOUND ",
        sort_ending_error="ERROR: FINAL SORTING",
        saving_final_error="FINAL SAVING ERROR",
        cin_clear_error="std::cin error, input not valid for variable expected",
        invalid_choice="Invalid choice\n",
        main_menu="***** MAIN MENU *****",
        option_menu="****** OPTION MENU ******",
        main_options=("New Game", "Continue", "Options", "Quit"),
        main_menu_error="MAIN MENU ERROR",
        new_game_prompt="Are you sure you want to delete all your saves?",
        new_game_choices=("Cancel", "Confirm"),
        wipe_success="Saves deleted successfully!",
        wipe_failure="AN error occurred when trying to delete saves!",
        option_choices=(
            "Return to main menu",
            "See finals unlocked",
            "Change language",
            "Delete saves",
        ),
        option_menu_error="Invalid choice\n",
        finals_known=("Normal: ", "Good:   ", "Bad:    ", "Lost:   ", "Death:  "),
        finals_hidden=("??????: ", "????:   ", "???:    ", "????:   ", "?????:  "),
        status_completed="Completed",
        status_incomplete="Incomplete",
        unlocked_finals_summary="\nNumber of finals unlocked: ",
        unlocked_finals_after_game="Number of finals unlocked: ",
        language_menu="***** CHANGE LANGUAGE *****",
        language_choices=("Italiano", "English"),
        language_error="Language change failed",
        goodbye="See ya!",
        introduction=(
            "Welcome!\nYou're approaching a completely unexplored\n"
            "pyramid and decide to enter..."
        ),
        wait="\nPress ENTER to continue...",
        wait_menu_return="\nPress ENTER to return to the main menu...",
        wait_options="Press ENTER to continue...",
        game_texts=(
            "You've decided to turn on a flashlight to see better!",
            "You decided to continue in the darkness, brave...",
            "You opened the vase and a spider bit you, you don't know if it's poisonous...",
            "You decided not to open the vase and continue...",
            "You've triggered all the traps!",
            " But you're still dazed from the spider bite...",
            "An arrow has lodged in your right foot, you've been slowed down.",
            "You drink the serum and are cured of the spider venom!",
            "You found a serum against spider venom, now you're immune.",
            "You leave the test tube there, wondering if it could be useful.",
            "You continue on your path, unaware of what was in the wall...",
            "That was close! Now, let's proceed with caution.",
            "You found a secret passage and managed to squeeze through it by a hair's breadth!",
            "You've decided to consult the map and head towards the exit...",
            "You've decided to ignore the map and continue...",
            "You've decided to continue without lifting the carpet...",
            "You are a good person...",
            "Asshole...",
        ),
        tasks=(
            "You're venturing deeper and it's starting to get dark, so you decide to:",
            "You found a vase, do you want to open it?",
            "You've encountered a path full of traps and you need to figure out how to get through, choose to:",
            "You find a strange wall, do you want to investigate?",
            "Behind a brick in the wall, you find a test tube with liquid inside:",
            "YOU HAVE 10 SECONDS! A boulder is rolling behind you and you have to escape!!",
            "You find a rug lying on the ground, do you want to lift it?",
            "It's a map! Do you want to consult it?",
            "You find the exit, what do you want to do with the rug?",
        ),
        choices=(
            ("Turn on a flashlight", "Continue in the darkness"),
            ("Open the vase", "Continue down the path"),
            (
                "Throw debris you find on the ground to trigger the traps",
                "Close your eyes and run, hoping you don't get caught in any traps",
            ),
            ("Investigate", "Continue to explore"),
            ("Drink it", "Leave it there and proceed"),
            (
                "You run to the first corner you find",
                "You start touching the wall, trying to see if there's a secret passage",
            ),
            ("Yes", "No"),
            ("Yes", "No"),
            ("Leave the carpet outside", "Burn the carpet"),
        ),
        too_late="You took too long and were crushed",
        get_ready="Get ready... ",
        ending_texts=(
            "You've completed the easiest ending,\nnow try find the other finals ;)\n[BASIC ENDING]",
            "BRAVO! You've completed the best ending,\nnow try find the other finals ;)\n[GOOD ENDING]",
            "Hello? You've completed the worst ending (without dying or getting lost),\n"
            "i think you'll need a some survival lessons...\n"
            "Now try find the other finals ;)\n[BAD ENDING]",
            "Since your foot has an arrow stuck in it,\n"
            "you weren't able to run fast enough and the boulder crushed you.\n[DEATH ENDING]",
            "You choose to not pick up the carpet, it was a map...\n"
            "Now you're lost in the Piramid forever!\n[LOST ENDING]",
        ),
        thanks_for_playing=(
            "Thanks for Playing!\nThis is my first project so I hope you enjoyed,\n"
            "if you encounter some bugs please feel free to report them!"
        ),
        game_dev="Game Dev: ",
    )


@lru_cache(maxsize=None)
def italian() -> Texts:
    """Return the Italian text table."""
    return Texts(
        file_not_found="FILE NON TROVATO ",
        sort_ending_error="ERRORE NEL SORTEGGIO DEL FINALE",
        saving_final_error="ERRORE NEL SALVATAGGIO DEL FINALE",
        cin_clear_error="errore di std::cin, input errato per il tipo di variabile assegnato",
        invalid_choice="Scelta non valida\n",
        main_menu="***** MENU PRINCIPALE *****",
        option_menu="****** MENU OPZIONI ******",
        main_options=("Nuova partita", "Continua", "Opzioni", "Esci"),
        main_menu_error="ERRORE DEL MENU",
        new_game_prompt="Sei sicuro di voler cancellare i tuoi salvataggi?",
        new_game_choices=("Annulla", "Conferma"),
        wipe_success="Salvataggi cancellati con successo!",
        wipe_failure="Errore nella cancellazione dei salvataggi!",
        option_choices=(
            "Torna al menu principale",
            "Vedi i finali sbloccati",
            "Cambia lingua",
            "Cancella salvataggi",
        ),
        option_menu_error="Scelta non valida\n",
        finals_known=(
            "Normale:  ",
            "Buono:    ",
            "Peggiore: ",
            "Perduto:  ",
            "Morto:    ",
        ),
        finals_hidden=(
            "???????:  ",
            "?????:    ",
            "????????: ",
            "???????:  ",
            "?????:    ",
        ),
        status_completed="Completato",
        status_incomplete="Incompletato",
        unlocked_finals_summary="\nNumero di finali sbloccati: ",
        unlocked_finals_after_game="Numero di finali sbloccati: ",
        language_menu="***** CAMBIA LINGUA *****",
        language_choices=("Italiano", "English"),
        language_error="Errore nell'impostazione della lingua",
        goodbye="Alla prossima!",
        introduction=(
            "Benvenuto!\nTi stai avvicinando in una piramide totalmente\n"
            "inesplorata e decidi di entrare..."
        ),
        wait="\nPremi ENTER per continuare...",
        wait_menu_return="\nPremi ENTER per tornare al menu principale...",
        wait_options="Premi ENTER per continuare...",
        game_texts=(
            "Hai deciso di accendere una torcia per poter veder meglio!",
            "Hai deciso di continuare nell'oscurità, coraggioso...",
            "Hai aperto il vaso e un ragno ti ha morso, non sai se è velenoso...",
            "Hai deciso di non aprire il vaso e proseguire...",
            "Hai fatto scattare tutte le trappole!",
            " Ma resti stordito dal morso del ragno...",
            "Una freccia si è conficcata nel tuo piede destro, sei rallentato",
            "Bevi il siero e guarisci dal veleno del ragno!",
            "Hai trovato un siero contro il veleno di un ragno, ora sei immune",
            "Lasci lì la provetta con il dubbio se potesse essere utile",
            "Continui per il tuo percorso senza sapere cosa c'era nel muro...",
            "Per un pelo! Ora proseguiamo con cautela",
            "Hai trovato un passaggio segreto e sei riuscito a infilarti per un pelo al suo interno!",
            "Decidi di consultare la mappa e ti dirigi verso l'uscita...",
            "Non consulti la mappa e continui per la tua strada...",
            "Decidi di proseguire senza alzare il tappeto...",
            "Sei una persona gentile...",
            "Stronzo...",
        ),
        tasks=(
            "Ti stai adentrando e inizia a diventare buio quindi decidi di:",
            "Hai trovato un vaso, vuoi aprirlo?",
            "Hai incontrato un percorso pieno di trappole e devi capire come poter passare, scegli di:",
            "Trovi un muro strano, vuoi investigare?",
            "Trovi dietro a un mattone del muro una provetta con del liquido all'interno:",
            "HAI 10 SECONDI! Un masso sta rotolando dietro di te e devi fuggire!!",
            "Trovi un tappeto steso a terra, vuoi alzarlo?",
            "È una mappa! Vuoi consultarla?",
            "Trovi l'uscita, cosa vuoi fare con il tappeto?",
        ),
        choices=(
            ("Accendere una torcia", "Continuare nell'oscurità"),
            ("Apri il vaso", "Continua per la strada"),
            (
                "Lanciare dei detriti che trovi a terra per far scattar le trappole",
                "Chiudi gli occhi e corri sperando che non ti becchi alcuna trappola",
            ),
            ("Investiga", "Continua ad esplorare"),
            ("Bevilo", "Lascialo lì e procedi"),
            (
                "Corri fino al primo angolo che trovi",
                "Ti metti a toccare il muro provando a vedere se c'è un passaggio segreto",
            ),
            ("Si", "No"),
            ("Si", "No"),
            ("Lascia fuori il tappeto", "Brucia il tappeto"),
        ),
        too_late="Ci hai messo troppo e sei stato schiacciato",
        get_ready="Preparati... ",
        ending_texts=(
            "Complimenti! Hai completato il finale più semplice,\n"
            "ora prova a trovare i restanti ;)\n[FINALE BASE]",
            "BRAVO! Hai completato il finale migliore,\n"
            "ora prova a trovare i restanti ;)\n[FINALE BUONO]",
            "Ciao? Hai completato il finale peggiore possibile (senza morire o perderti),\n"
            "mi sa che ti serve un corso di sopravvivenza...\n"
            "Ora prova a trovare i restanti ;)\n[FINALE CATTIVO]",
            "Dato che il tuo piede ha una freccia conficcata al suo interno\n"
            "non sei riuscito a correre abbastanza velocemente ed il masso ti ha schiacciato.\n"
            "[FINALE MORTE]",
            "Non hai voluto consultare il tappeto, era una mappa...\n"
            "Ora sei perso per sempre all'interno della piramide per sempre!\n"
            "[FINALE PERDUTO]",
        ),
        thanks_for_playing=(
            "Grazie per aver giocato!\n"
            "Questo è il mio primo progetto quindi spero vi sia piaciuto,\n"
            "per ogni riscontro di bug o altro siete pregati di comunicarcelo!"
        ),
        game_dev="Programmatore del Gioco: ",
    )


def texts_for(language: Language | str) -> Texts:
    """Return the text table for a language or its code ("en", "it").

    Raises ValueError for an unknown language.
    """
    language = Language(language)
    if language is Language.ITALIAN:
        return italian()
    return english()